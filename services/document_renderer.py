# services/document_renderer.py
"""
Renders structured documents (receipts, settlement statements) to PDF.
"""
from fpdf import FPDF
from fpdf.enums import XPos, YPos

from schemas import PrintableDocument


def _latin1(text: str) -> str:
     # Core PDF fonts only cover latin-1
     return (text or "").replace("€", "EUR").encode("latin-1", "replace").decode("latin-1")


def render_document(document: PrintableDocument) -> bytes:
     """
     Render a document to PDF bytes.

     Layout: title, issuer block, one label/value line per row, closing note.
     """
     pdf = FPDF()
     pdf.set_title(_latin1(document.title))
     pdf.add_page()

     pdf.set_font("Helvetica", style="B", size=18)
     pdf.cell(0, 12, text=_latin1(document.title), new_x=XPos.LMARGIN, new_y=YPos.NEXT, align="C")
     pdf.ln(4)

     if document.issuer_lines:
          pdf.set_font("Helvetica", size=10)
          for line in document.issuer_lines:
               pdf.cell(0, 6, text=_latin1(line), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
          pdf.ln(6)

     for label, value in document.rows:
          pdf.set_font("Helvetica", style="B", size=11)
          pdf.cell(70, 8, text=_latin1(f"{label} :"))
          pdf.set_font("Helvetica", size=11)
          pdf.cell(0, 8, text=_latin1(value), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

     if document.note:
          pdf.ln(10)
          pdf.set_font("Helvetica", style="I", size=10)
          pdf.multi_cell(0, 6, text=_latin1(document.note))

     return bytes(pdf.output())
