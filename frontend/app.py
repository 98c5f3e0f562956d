"""
Bank Receipt Reader - Streamlit Frontend
Upload transfer receipts, identify the bank and view the extracted fields
"""

import streamlit as st
import sys
from pathlib import Path
from datetime import datetime
from decimal import Decimal
import tempfile

# Add backend to path
backend_path = Path(__file__).parent.parent / 'backend'
sys.path.insert(0, str(backend_path))

# Import backend modules
from config import config
from logging_config import setup_logging
from extractors.financial_rules import format_amount_display
from extractors.outcome import Identified, Failure
from loaders.receipt_loader import load_receipt_text
from main import ReceiptReader
from output.writer import field_label, format_json, generate_pdf_report

setup_logging()

# Page configuration
st.set_page_config(
    page_title="Bank Receipt Reader",
    page_icon="🧾",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Custom CSS
st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        color: #ef8145;
        margin-bottom: 0.5rem;
    }
    .sub-header {
        font-size: 1.2rem;
        color: #808183;
        margin-bottom: 2rem;
    }
</style>
""", unsafe_allow_html=True)

# Initialize session state
if 'results' not in st.session_state:
    st.session_state.results = None
if 'report_path' not in st.session_state:
    st.session_state.report_path = None

UPLOAD_TYPES = [ext.lstrip('.') for ext in config.ALLOWED_FILE_TYPES]


def main():
    """Main application function."""

    # Header
    st.markdown('<div class="main-header">🧾 Bank Receipt Reader</div>', unsafe_allow_html=True)
    st.markdown('<div class="sub-header">Identify the bank of a transfer receipt and extract its fields</div>', unsafe_allow_html=True)

    # Sidebar - Input Configuration
    with st.sidebar:
        st.header("📋 Receipts")

        uploaded_files = st.file_uploader(
            "Choose receipt image(s) or PDF(s)",
            type=UPLOAD_TYPES,
            accept_multiple_files=True,
            help=f"Max {config.MAX_FILE_SIZE_MB} MB per file"
        )

        show_text = st.checkbox("Show acquired text", value=False)
        build_report = st.checkbox("Generate PDF summary", value=False)

        st.divider()

        process_btn = st.button(
            "🚀 Read Receipts",
            type="primary",
            use_container_width=True,
            disabled=not uploaded_files
        )

    if not uploaded_files:
        st.info("👈 Upload one or more receipts from the sidebar to get started")
        st.subheader("Supported banks:")
        st.markdown("Afirme, BanBajío, Banorte, Banregio, BBVA, HSBC, Santander, Scotiabank")

    if process_btn and uploaded_files:
        process_receipts(uploaded_files, show_text, build_report)

    if st.session_state.results:
        display_results()


def process_receipts(uploaded_files, show_text: bool, build_report: bool):
    """Read every uploaded receipt and store the outcomes in session state."""
    results = []
    progress_bar = st.progress(0, text="Reading receipts...")

    for idx, uploaded_file in enumerate(uploaded_files):
        name = uploaded_file.name
        data = uploaded_file.getvalue()
        progress_bar.progress(int(100 * idx / len(uploaded_files)), text=f"Reading {name}...")

        is_valid, error = config.validate_file(name, len(data))
        if not is_valid:
            results.append((name, Failure(error), None))
            continue

        with tempfile.NamedTemporaryFile(delete=False, suffix=Path(name).suffix.lower()) as tmp_file:
            tmp_file.write(data)
            tmp_path = tmp_file.name

        acquired = {}

        def loader(path):
            acquired['text'] = load_receipt_text(path)
            return acquired['text']

        try:
            outcome = ReceiptReader(text_loader=loader).read_receipt(tmp_path)
        finally:
            Path(tmp_path).unlink(missing_ok=True)

        results.append((name, outcome, acquired.get('text') if show_text else None))

    progress_bar.progress(100, text="Complete!")

    st.session_state.report_path = None
    if build_report:
        output_path = config.get_output_path(f"receipts_{datetime.now().strftime('%Y%m%d_%H%M%S')}.pdf")
        generate_pdf_report(str(output_path), [(name, outcome) for name, outcome, _ in results])
        st.session_state.report_path = output_path

    st.session_state.results = results


def display_results():
    """Display one panel per receipt."""
    results = st.session_state.results
    identified = sum(1 for _, outcome, _ in results if isinstance(outcome, Identified))

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Receipts", len(results))
    with col2:
        st.metric("Identified", identified)

    st.divider()

    for name, outcome, text in results:
        with st.expander(f"**{name}**", expanded=len(results) == 1):
            if isinstance(outcome, Identified):
                result = outcome.result
                st.success(f"Bank: {result.institution} | Type: {result.transaction_type}")
                rows = [
                    {
                        "Field": field_label(key),
                        "Value": format_amount_display(value) if isinstance(value, Decimal) else value
                    }
                    for key, value in result.fields.items()
                ]
                st.table(rows)
            elif isinstance(outcome, Failure):
                st.error(f"❌ {outcome.message}")
            else:
                st.warning("⚠️ Could not identify bank from receipt")

            st.code(format_json(outcome), language="json")
            if text is not None:
                st.text_area("Acquired text", text, height=200, key=f"text_{name}")

    if st.session_state.report_path and Path(st.session_state.report_path).exists():
        with open(st.session_state.report_path, 'rb') as pdf_file:
            st.download_button(
                label="📄 Download PDF Summary",
                data=pdf_file.read(),
                file_name=Path(st.session_state.report_path).name,
                mime="application/pdf",
                type="primary"
            )

    if st.button("🔄 Read Other Receipts", use_container_width=True):
        st.session_state.results = None
        st.session_state.report_path = None
        st.rerun()


if __name__ == "__main__":
    main()
