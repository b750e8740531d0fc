"""
Single source of truth for Excel colors, fonts, fills, borders, alignments.
"""
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

# ---------------------------------------------------------------------------
# Color constants
# ---------------------------------------------------------------------------
BURGUNDY = "7B1E3A"
DARK_BURGUNDY = "4A0E22"
BLUSH = "F8E8EC"
HEADER_BG = "4A0E22"
ALTERNATE_ROW = "F7F4F2"
WHITE = "FFFFFF"
BLACK = "000000"
LIGHT_GOLD = "FFF8DC"
GRAY_666 = "666666"

# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------
TITLE_FONT = Font(name="Calibri", size=24, bold=True, color=DARK_BURGUNDY)
SUBTITLE_FONT = Font(name="Calibri", size=12, italic=True, color=GRAY_666)
HEADER_FONT = Font(name="Calibri", size=11, bold=True, color=WHITE)
DATA_FONT = Font(name="Calibri", size=10, color=BLACK)
SECTION_FONT = Font(name="Calibri", size=14, bold=True, color=DARK_BURGUNDY)
KPI_VALUE_FONT = Font(name="Calibri", size=28, bold=True, color=BURGUNDY)
KPI_LABEL_FONT = Font(name="Calibri", size=10, color=GRAY_666)

# ---------------------------------------------------------------------------
# Fills
# ---------------------------------------------------------------------------
HEADER_FILL = PatternFill(start_color=HEADER_BG, end_color=HEADER_BG, fill_type="solid")
ALTERNATE_FILL = PatternFill(start_color=ALTERNATE_ROW, end_color=ALTERNATE_ROW, fill_type="solid")
BLUSH_FILL = PatternFill(start_color=BLUSH, end_color=BLUSH, fill_type="solid")
GOLD_FILL = PatternFill(start_color=LIGHT_GOLD, end_color=LIGHT_GOLD, fill_type="solid")

# ---------------------------------------------------------------------------
# Borders
# ---------------------------------------------------------------------------
THIN_BORDER = Border(
    left=Side(style="thin", color="CCCCCC"),
    right=Side(style="thin", color="CCCCCC"),
    top=Side(style="thin", color="CCCCCC"),
    bottom=Side(style="thin", color="CCCCCC"),
)
HEADER_BORDER = Border(
    left=Side(style="thin", color=DARK_BURGUNDY),
    right=Side(style="thin", color=DARK_BURGUNDY),
    top=Side(style="thin", color=DARK_BURGUNDY),
    bottom=Side(style="medium", color=DARK_BURGUNDY),
)

# ---------------------------------------------------------------------------
# Alignments
# ---------------------------------------------------------------------------
CENTER = Alignment(horizontal="center", vertical="center")
LEFT = Alignment(horizontal="left", vertical="center")
RIGHT = Alignment(horizontal="right", vertical="center")
WRAP = Alignment(horizontal="left", vertical="top", wrap_text=True)

# ---------------------------------------------------------------------------
# Highlight name → fill mapping
# ---------------------------------------------------------------------------
HIGHLIGHT_FILLS = {
    "gold": GOLD_FILL,
    "blush": BLUSH_FILL,
}
