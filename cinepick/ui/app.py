"""
Streamlit main app for CinePick.

Run: streamlit run cinepick/ui/app.py --server.port 8501
"""

import streamlit as st
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from cinepick.ui.utils.session_state import init_session_state

st.set_page_config(
    page_title="CinePick",
    page_icon="🎬",
    layout="wide",
    initial_sidebar_state="expanded",
)

init_session_state()

st.title("🎬 CinePick")
st.markdown("Discover movies you'll love: rate what you've seen and get picks tailored to your taste.")

try:
    from cinepick.ui.utils.api_client import health_check
    health = health_check()
    if health.get("status") == "healthy":
        st.success(f"API connected ({health.get('movies', 0)} movies in the catalog)")
    else:
        st.warning("API may not be fully ready")
except Exception as e:
    st.error(f"API not available: {e}")
    st.info("Start the API with: uvicorn cinepick.api.main:app --host 0.0.0.0 --port 8000")

st.divider()

user_id = st.session_state.get("user_id")
if user_id:
    st.subheader(f"Welcome back, {(st.session_state.get('user_data') or {}).get('name') or f'User #{user_id}'}")
    col1, col2, col3 = st.columns(3)
    with col1:
        if st.button("📋 My Profile", use_container_width=True):
            st.switch_page("pages/1_user_profile.py")
    with col2:
        if st.button("🎯 Recommendations", use_container_width=True):
            st.switch_page("pages/2_recommendations.py")
    with col3:
        if st.button("🔍 Browse", use_container_width=True):
            st.switch_page("pages/3_browse.py")
else:
    st.info("Create your profile to get started.")
    if st.button("Get Started"):
        st.switch_page("pages/1_user_profile.py")
