import requests
import streamlit as st

from autofoundr.builder import Builder, GenerationClient
from autofoundr.config import Settings, configure_logging

# Config
settings = Settings.from_env()
configure_logging(settings.log_level)

st.set_page_config(page_title="AutoFoundr — Build a Business in Minutes", page_icon="🛍️", layout="wide")


def make_builder(proxy_url: str) -> Builder:
    client = GenerationClient(proxy_url, timeout=settings.request_timeout)
    return Builder(client, alert=st.error)


def init_state():
    if "proxy_url" not in st.session_state:
        st.session_state.proxy_url = settings.proxy_url
    if "builder" not in st.session_state:
        st.session_state.builder = make_builder(st.session_state.proxy_url)


def reset_form():
    st.session_state.idea = ""
    st.session_state.builder.reset()


def proxy_health_url(proxy_url: str) -> str:
    return proxy_url.replace("/api/generate", "/health")


init_state()
builder = st.session_state.builder

col1, col2 = st.columns([3, 1])
with col1:
    st.title("AutoFoundr")
    st.write("Type a product idea — get a full store scaffold instantly.")
with col2:
    st.markdown("**Status**")
    try:
        health = requests.get(proxy_health_url(st.session_state.proxy_url), timeout=3).json()
        healthy = isinstance(health, dict) and health.get("status") == "healthy"
        st.write("Proxy:", "✅" if healthy else "❌")
    except (requests.exceptions.RequestException, ValueError):
        st.write("Proxy:", "❌ not connected")


with st.sidebar:
    st.header("Settings")
    st.text_input("Proxy URL", value=st.session_state.proxy_url, key="proxy_url_input")
    if st.button("Apply URL"):
        st.session_state.proxy_url = st.session_state.proxy_url_input.strip() or settings.proxy_url
        st.session_state.builder = builder = make_builder(st.session_state.proxy_url)
        st.success("New proxy URL applied.")
    st.markdown("---")
    show_raw = st.checkbox("Show raw JSON", value=False)


with st.form("builder_form"):
    idea = st.text_input("Product idea", key="idea", placeholder="e.g., eco-friendly phone case")
    submit_col, reset_col = st.columns(2)
    with submit_col:
        submitted = st.form_submit_button("Generate Store", disabled=builder.is_busy)
    with reset_col:
        st.form_submit_button("Reset", on_click=reset_form)

if submitted:
    with st.spinner("Generating..."):
        builder.submit(idea)


bundle = builder.bundle
if bundle:
    st.markdown("---")
    left, right = st.columns(2)
    with left:
        st.subheader("Brand")
        st.write(bundle.brand.name)
        st.image(bundle.brand.logo, caption="logo", width=128)
    with right:
        st.subheader("Product")
        st.write(bundle.product.title)
        st.write(bundle.product.description)
        st.markdown(f"**Price:** {bundle.product.price}")

        st.markdown("**Ad Ideas**")
        st.markdown("\n".join(f"- {ad}" for ad in bundle.ads))

        # Placeholders only: publishing and export have no backing implementation
        publish_col, export_col = st.columns(2)
        with publish_col:
            st.button("Publish (mock)", key="publish", disabled=True, help="Not available in this prototype")
        with export_col:
            st.button("Export JSON", key="export_json", disabled=True, help="Not available in this prototype")

    if show_raw:
        st.subheader("Raw JSON")
        st.json(bundle.model_dump())

st.markdown("---")
st.caption("Prototype • Not for production use")
