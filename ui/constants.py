"""UI constants for the HackHub Streamlit app."""

from models import NavItem
from profile_submission import EDIT_PROFILE_PATH

# Page paths
HOME_PATH = "/home"
HACKATHONS_PATH = "/hackathons"
PROFILE_PATH = "/profile"
ABOUT_PATH = "/about"
CONTACT_PATH = "/contact"
SIGN_IN_PATH = "/sign-in"
LOGIN_PATH = "/login"
REGISTER_PATH = "/register"

# Header navigation, left to right
NAV_ITEMS = [
    NavItem(name="Home", link=HOME_PATH),
    NavItem(name="Hackathons", link=HACKATHONS_PATH),
    NavItem(name="About", link=ABOUT_PATH),
    NavItem(name="Contact", link=CONTACT_PATH),
]

# Account buttons on the right of the header
ACCOUNT_ITEMS = [
    NavItem(name="Register", link=REGISTER_PATH),
    NavItem(name="Login", link=LOGIN_PATH),
]

# Session state keys owned by views
DETAIL_VIEW_KEY = "hackathon_detail"
PROFILE_SUBMISSION_KEY = "profile_submission"
SESSION_FLAGS_KEY = "session_flags"

# Theme colors
ACCENT_COLOR = "#ef4444"
ACTIVE_UNDERLINE_COLOR = "#3b82f6"
