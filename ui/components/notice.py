import streamlit as st
from typing import Optional

from models import Notice

NOTICE_ICONS = {
    'success': '✅',
    'error': '⚠️',
    'warning': '🔒',
    'info': 'ℹ️',
}


def render_notice(notice: Optional[Notice]) -> None:
    """Render an inline notice with the Streamlit alert matching its level."""
    if notice is None:
        return

    render = {
        'success': st.success,
        'error': st.error,
        'warning': st.warning,
        'info': st.info,
    }.get(notice.level, st.info)
    render(notice.message, icon=NOTICE_ICONS.get(notice.level))


def show_toast(notice: Optional[Notice]) -> None:
    """Show a transient notification (bottom-right toast)."""
    if notice is None:
        return
    st.toast(notice.message, icon=NOTICE_ICONS.get(notice.level, 'ℹ️'))
