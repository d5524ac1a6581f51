import qtawesome as qta
from PySide6.QtWidgets import (QWidget, QLabel, QPushButton, QVBoxLayout, QHBoxLayout,
                               QFrame, QGraphicsDropShadowEffect, QComboBox, QListView)
from PySide6.QtCore import Qt, Signal, QPropertyAnimation, QEasingCurve, QSize, QTimer
from PySide6.QtGui import QColor

# --- SHARED COLORS ---
ACCENT_COLOR = "#60cdff"
BG_DARK = "#242424"
TILE_INACTIVE = "#3e3e3e"
TILE_HOVER = "#4e4e4e"
TEXT_WHITE = "#ffffff"
TEXT_SUB = "#cccccc"


class ClickableLabel(QWidget):
    """Icon + text label. A short click emits `clicked`, a hold emits `long_clicked`."""
    clicked = Signal()
    long_clicked = Signal()

    def __init__(self, text="", parent=None, settings=None, text_color=TEXT_WHITE):
        super().__init__(parent)
        self.settings = settings
        self.text_color = text_color
        self.setCursor(Qt.PointingHandCursor)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(5, 0, 5, 0)
        layout.setSpacing(5)

        self.icon_lbl = QLabel()
        self.icon_lbl.setStyleSheet("background: transparent; border: none;")
        self.icon_lbl.setVisible(False)

        self.text_lbl = QLabel(text)
        self.text_lbl.setStyleSheet("background: transparent; border: none;")

        layout.addWidget(self.icon_lbl)
        layout.addWidget(self.text_lbl)

        # Press-and-hold detection
        self._long_fired = False
        self.press_timer = QTimer(self)
        self.press_timer.setSingleShot(True)
        self.press_timer.timeout.connect(self._on_long_press)
        if settings:
            self.press_timer.setInterval(settings.long_press_ms)
            self.text_lbl.setStyleSheet(f"""
                color: {text_color};
                font-family: '{settings.font_family}';
                font-size: {settings.font_size};
                background: transparent;
            """)
        else:
            self.press_timer.setInterval(600)

    def setText(self, text):
        self.text_lbl.setText(text)

    def text(self):
        return self.text_lbl.text()

    def setIcon(self, icon_name, color=None):
        icon = qta.icon(icon_name, color=color or self.text_color)
        pixmap = icon.pixmap(QSize(16, 16))
        self.icon_lbl.setPixmap(pixmap)
        self.icon_lbl.setVisible(True)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self._long_fired = False
            self.press_timer.start()

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.press_timer.stop()
            if not self._long_fired:
                self.clicked.emit()

    def _on_long_press(self):
        self._long_fired = True
        self.long_clicked.emit()


class BasePopupWidget(QWidget):
    """Frameless dark card under the bar. ``content`` is a line of text or a widget."""
    def __init__(self, title, content, settings):
        super().__init__()
        self.setWindowFlags(Qt.FramelessWindowHint | Qt.Popup | Qt.NoDropShadowWindowHint)
        self.setAttribute(Qt.WA_TranslucentBackground)
        self.setWindowOpacity(0.0)
        self.heading = title
        self.content = content

        outer = QVBoxLayout(self)
        outer.setContentsMargins(10, 10, 10, 10)

        self.frame = QFrame()
        self.frame.setObjectName("PopupFrame")
        self.frame.setStyleSheet(f"""
            QFrame#PopupFrame {{
                background-color: {BG_DARK};
                border: 1px solid {settings.border_color};
                border-radius: 10px;
            }}
            QLabel {{
                color: {TEXT_WHITE};
                border: none;
                font-family: '{settings.font_family}';
            }}
        """)
        shadow = QGraphicsDropShadowEffect(self, blurRadius=18, xOffset=0, yOffset=3)
        shadow.setColor(QColor(0, 0, 0, 110))
        self.frame.setGraphicsEffect(shadow)

        body = QVBoxLayout(self.frame)
        body.setContentsMargins(14, 12, 14, 14)
        body.setSpacing(10)
        body.addWidget(self._label(f"<b>{title}</b>"))
        body.addWidget(self._label(content) if isinstance(content, str) else content)
        outer.addWidget(self.frame)

        self.fade = QPropertyAnimation(self, b"windowOpacity")
        self.fade.setDuration(150)
        self.fade.setEasingCurve(QEasingCurve.OutCubic)

    @staticmethod
    def _label(text):
        lbl = QLabel(text)
        lbl.setWordWrap(True)
        lbl.setAlignment(Qt.AlignCenter)
        return lbl

    def _fade_to(self, start, end):
        self.fade.stop()
        self.fade.setStartValue(start)
        self.fade.setEndValue(end)
        self.fade.start()

    def show_animated(self):
        self.adjustSize()
        self.show()
        self._fade_to(0.0, 1.0)

    def close_animated(self):
        self.fade.finished.connect(self.close)
        self._fade_to(self.windowOpacity(), 0.0)


# --- SHARED UI CONTROLS ---

class CompactToggleBtn(QPushButton):
    """Round on/off button for one clock segment. The icon turns dark on the accent fill."""
    def __init__(self, icon_name, tooltip_text="", active=False, parent=None):
        super().__init__(parent)
        self.icons = {True: qta.icon(icon_name, color="black"),
                      False: qta.icon(icon_name, color=TEXT_WHITE)}
        self.setCheckable(True)
        self.setFixedSize(34, 34)
        self.setIconSize(QSize(18, 18))
        self.setCursor(Qt.PointingHandCursor)
        self.setToolTip(tooltip_text)
        self.toggled.connect(lambda checked: self.setIcon(self.icons[checked]))
        self.setChecked(bool(active))
        self.setIcon(self.icons[bool(active)])

        self.setStyleSheet(f"""
            QPushButton {{
                background-color: {TILE_INACTIVE};
                border: 1px solid #555;
                border-radius: 13px;
            }}
            QPushButton:hover {{ background-color: {TILE_HOVER}; }}
            QPushButton:checked {{
                background-color: {ACCENT_COLOR};
                border-color: {ACCENT_COLOR};
            }}
        """)


class ModernComboBox(QComboBox):
    """Styled QComboBox for the dark popups. Items carry their setting value as data."""
    def __init__(self, items=(), current=None, parent=None):
        super().__init__(parent)
        self.setCursor(Qt.PointingHandCursor)
        self.setView(QListView(self))

        for label, value in items:
            self.addItem(label, value)
        if current is not None:
            idx = self.findData(current)
            if idx >= 0:
                self.setCurrentIndex(idx)

        self.setStyleSheet(f"""
            QComboBox {{
                background-color: {TILE_INACTIVE};
                border: 1px solid #555;
                border-radius: 4px;
                padding: 4px 10px;
                color: {TEXT_WHITE};
                font-size: 12px;
                min-height: 20px;
            }}
            QComboBox:hover {{
                background-color: {TILE_HOVER};
            }}
            QComboBox QAbstractItemView {{
                background-color: {BG_DARK};
                border: 1px solid #454545;
                selection-background-color: {ACCENT_COLOR};
                selection-color: black;
                color: {TEXT_WHITE};
                outline: none;
            }}
        """)
