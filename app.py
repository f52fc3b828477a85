# app.py
from typing import Optional

import streamlit as st

from algorithms.lcs import lcs_table_cells
from algorithms.similarity import compute_similarity, normalize_text
from utils.config import get_settings
from utils.errors import DocumentIOError
from utils.formatting import format_result
from utils.text_io import read_files_as_texts

st.set_page_config(page_title="LCS Plagiarism Checker", layout="wide")
st.title("LCS Plagiarism Checker")
st.caption("Whitespace is ignored; characters are compared exactly.")

settings = get_settings()
colA, colB = st.columns(2)

def _document(col, label: str, key: str) -> Optional[str]:
    with col:
        st.subheader(label)
        upload = st.file_uploader(f"Upload {label.lower()} (.txt)", type=["txt"], key=f"{key}_file")
        if upload is not None:
            try:
                texts, _ = read_files_as_texts([upload], settings.encoding)
            except DocumentIOError as e:
                st.error(f"Cannot read {e.path}: {e.reason}")
                return None
            return texts[0]
        return st.text_area(f"or paste {label.lower()}", height=260, key=f"{key}_text")

textA = _document(colA, "Original", "orig")
textB = _document(colB, "Candidate", "cand")

if st.button("Check similarity", type="primary"):
    if textA is None or textB is None:
        st.error("Fix the unreadable upload before checking.")
    elif max(len(textA), len(textB)) > settings.max_chars:
        st.error(f"Documents are limited to {settings.max_chars} characters each.")
    else:
        cells = lcs_table_cells(len(normalize_text(textA)), len(normalize_text(textB)))
        with st.spinner(f"Comparing ({cells:,} DP cells)..."):
            sim = compute_similarity(textA, textB)
        st.metric("Similarity", format_result(sim))
        st.progress(min(1.0, sim))

# Run with: streamlit run app.py
