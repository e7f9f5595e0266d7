"""
Dark neon stylesheet for the entire application.
Near-black base with cyan and hot-pink accents.
"""

DARK_STYLESHEET = """
/* ── Base ────────────────────────────────────────────────────────── */
QWidget {
    background-color: #0a0a0a;
    color: #e0e0e0;
    font-family: "Arial", "Segoe UI", sans-serif;
    font-size: 13px;
}

QMainWindow {
    background-color: #0a0a0a;
}

/* ── Buttons ─────────────────────────────────────────────────────── */
QPushButton {
    background-color: #141414;
    color: #e0e0e0;
    border: 1px solid #333333;
    border-radius: 4px;
    padding: 8px 18px;
    font-weight: 700;
    letter-spacing: 1px;
    min-height: 24px;
}

QPushButton:hover {
    background-color: #1f1f1f;
    border-color: #00d9ff;
}

QPushButton:pressed {
    background-color: #2a2a2a;
}

QPushButton#primary {
    background-color: #00d9ff;
    color: #0a0a0a;
    border: none;
}

QPushButton#primary:hover {
    background-color: #5ce6ff;
}

QPushButton#accent {
    background-color: #ff0080;
    color: #0a0a0a;
    border: none;
}

QPushButton#accent:hover {
    background-color: #ff4da6;
}

/* ── Input fields ────────────────────────────────────────────────── */
QLineEdit, QTimeEdit {
    background-color: #141414;
    color: #e0e0e0;
    border: 1px solid #333333;
    border-radius: 4px;
    padding: 6px 10px;
    selection-background-color: #00d9ff;
    selection-color: #0a0a0a;
}

QLineEdit:focus, QTimeEdit:focus {
    border-color: #00d9ff;
}

/* ── ComboBox ────────────────────────────────────────────────────── */
QComboBox {
    background-color: #141414;
    color: #e0e0e0;
    border: 1px solid #333333;
    border-radius: 4px;
    padding: 6px 10px;
    min-width: 140px;
}

QComboBox::drop-down {
    border: none;
    width: 24px;
}

QComboBox QAbstractItemView {
    background-color: #141414;
    color: #e0e0e0;
    border: 1px solid #333333;
    selection-background-color: #1f1f1f;
}

/* ── Labels ──────────────────────────────────────────────────────── */
QLabel {
    background: transparent;
    color: #e0e0e0;
}

QLabel#title {
    font-size: 30px;
    font-weight: 800;
    letter-spacing: 4px;
    color: #ffffff;
}

QLabel#subtitle {
    font-size: 13px;
    letter-spacing: 2px;
    color: #888888;
}

QLabel#alias {
    font-size: 22px;
    font-weight: 700;
    color: #00d9ff;
}

QLabel#peak_window {
    font-size: 40px;
    font-weight: 800;
    font-family: "Consolas", "Courier New", monospace;
    color: #ffffff;
}

QLabel#peak_caption {
    font-size: 12px;
    letter-spacing: 2px;
    color: #ff0080;
}

QLabel#metric_value {
    font-size: 28px;
    font-weight: 700;
    color: #00d9ff;
}

QLabel#metric_label {
    font-size: 11px;
    letter-spacing: 1px;
    color: #888888;
}

/* ── Time slots ──────────────────────────────────────────────────── */
QFrame#slot {
    background-color: #111111;
    border-left: 3px solid #333333;
    border-radius: 2px;
}

QFrame#slot_peak {
    background-color: #1a0a12;
    border-left: 3px solid #ff0080;
    border-radius: 2px;
}

QLabel#slot_time {
    font-family: "Consolas", "Courier New", monospace;
    font-size: 14px;
    font-weight: 700;
    color: #00d9ff;
}

QLabel#slot_title {
    font-size: 13px;
    font-weight: 700;
    color: #ffffff;
}

QLabel#slot_description {
    font-size: 11px;
    color: #777777;
}

/* ── Scroll Area ─────────────────────────────────────────────────── */
QScrollArea {
    border: none;
    background-color: transparent;
}

QScrollBar:vertical {
    background-color: #0f0f0f;
    width: 10px;
    border-radius: 5px;
}

QScrollBar::handle:vertical {
    background-color: #333333;
    border-radius: 5px;
    min-height: 20px;
}

QScrollBar::handle:vertical:hover {
    background-color: #00d9ff;
}

/* ── Message Box ─────────────────────────────────────────────────── */
QMessageBox {
    background-color: #0a0a0a;
}

/* ── Tooltip ─────────────────────────────────────────────────────── */
QToolTip {
    background-color: #141414;
    color: #e0e0e0;
    border: 1px solid #00d9ff;
    border-radius: 4px;
    padding: 4px 8px;
}

/* ── Progress Bar ────────────────────────────────────────────────── */
QProgressBar {
    background-color: #141414;
    border-radius: 4px;
    text-align: center;
    color: #e0e0e0;
    height: 12px;
}

QProgressBar::chunk {
    background-color: #ff0080;
    border-radius: 4px;
}
"""
