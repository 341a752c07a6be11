import streamlit as st

# MUST be the first Streamlit command
st.set_page_config(layout="wide", page_title="Truth Engine Profile Viewer")

import atexit

import config
from fetcher import fetch_profile
from renderer import render_error_html, render_profile_html, visible_sections, page_metadata
from profile_server import serve_profile, cleanup_profile_server, get_server_status

config.configure_logging()

# Register cleanup function to run when Streamlit exits
atexit.register(cleanup_profile_server)

SECTION_LABELS = {
    "header": "👤 About",
    "experience": "💼 Experience",
    "education": "🎓 Education",
    "skills": "🛠️ Skills",
    "projects": "🚀 Projects",
    "footer": "📄 Data",
}

# Initialize session state variables
if "profile_loaded" not in st.session_state:
    st.session_state.profile_loaded = False
if "profile" not in st.session_state:
    st.session_state.profile = None
if "preview_url" not in st.session_state:
    st.session_state.preview_url = None

handle = config.get_handle()
api_base = config.get_api_base()

# --- SIDEBAR ---
with st.sidebar:
    st.markdown("### ⚙️ Truth Engine")
    st.caption(f"Handle: `{handle or 'not set'}`")
    st.caption(f"API: `{api_base}`")
    if st.button("🔄 Reload profile", use_container_width=True):
        st.session_state.profile_loaded = False

# Fetch once per session; the reload button clears the flag
if not st.session_state.profile_loaded:
    with st.spinner("Syncing with Truth Engine..."):
        st.session_state.profile = fetch_profile(handle, api_base)
    st.session_state.profile_loaded = True

profile = st.session_state.profile

if profile is None:
    st.title("Profile Unavailable")
    st.error(f"Setup Required: please set {config.HANDLE_ENV_VAR} (and optionally "
             f"{config.API_URL_ENV_VAR}) for this deployment.")
    st.components.v1.html(render_error_html(inline=True), height=320)
    st.stop()

html_output = render_profile_html(profile, api_base=api_base, inline=True)
meta = page_metadata(profile)

with st.sidebar:
    st.markdown("### 🧭 Sections")
    for name in visible_sections(profile):
        st.markdown(f"- {SECTION_LABELS[name]}")

    st.divider()
    st.download_button(
        label="📥 Download",
        data=html_output,
        file_name="index.html",
        mime="text/html",
        help="Download the rendered page as a single HTML file",
        use_container_width=True
    )
    if st.button("🌐 Open local preview server", use_container_width=True):
        try:
            st.session_state.preview_url = serve_profile(handle=handle, api_base=api_base)
        except OSError as e:
            st.warning(f"Could not start preview server: {e}")
    if get_server_status()["is_running"] and st.session_state.preview_url:
        st.caption(f"Preview: {st.session_state.preview_url}")

st.title(meta["title"])
st.caption(meta["description"])
st.components.v1.html(html_output, height=900, scrolling=True)
