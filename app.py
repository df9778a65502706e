from __future__ import annotations

import streamlit as st

from jargon_to_human.highlight import render_highlighted_text
from jargon_to_human.pipeline import translate
from jargon_to_human.samples import DEFAULT_INPUT, DEV_SAMPLES
from jargon_to_human.text_utils import strip_highlight_markers


EMPTY_OUTPUT = "No output yet."

st.set_page_config(page_title="Jargon to Human", layout="wide")

st.markdown(
    "<style>mark.highlight{background:rgba(110,231,183,0.3);color:inherit;padding:0 2px;}</style>",
    unsafe_allow_html=True,
)

st.title("Jargon to Human")
st.write("Turns crypto jargon into plain words. Runs locally with fixed rules.")

with st.sidebar:
    st.header("Options")
    keep_key_terms = st.checkbox("Keep key terms (thread version)", value=False)
    highlight = st.checkbox("Highlight explained terms", value=True)
    reading_level = st.radio("Reading level", ["simple", "normal"], index=0, horizontal=True)

    st.divider()
    st.subheader("Try a sample")
    sample = st.selectbox("Sample", ["(your own text)", *DEV_SAMPLES], index=0)

initial = DEFAULT_INPUT if sample == "(your own text)" else sample
text = st.text_area("Jargon", initial, height=140)

if text.strip():
    result = translate(text, reading_level=reading_level, keep_key_terms=keep_key_terms)
    outputs = {"Plain": result.plain, "X-ready": result.x_ready, "Newbie": result.newbie}
    st.caption(
        f"Two-layer explanation: {'yes' if result.meta.used_two_layer else 'no'} · "
        f"Guardrail: {'yes' if result.meta.used_guardrail else 'no'}"
    )
else:
    outputs = {"Plain": EMPTY_OUTPUT, "X-ready": EMPTY_OUTPUT, "Newbie": EMPTY_OUTPUT}

cols = st.columns(3)
for col, (title, body) in zip(cols, outputs.items()):
    with col:
        st.subheader(title)
        st.markdown(render_highlighted_text(body, highlight), unsafe_allow_html=True)
        st.caption(f"{len(body)} characters")
        st.download_button(
            f"Download {title.lower()}",
            data=strip_highlight_markers(body),
            file_name=f"{title.lower().replace('-', '_')}.txt",
            key=f"dl_{title}",
        )
