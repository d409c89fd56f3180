# components/tappable.py
# Small widgets that react to clicks without being QPushButtons.

from PyQt6.QtCore import Qt, pyqtSignal, QRectF
from PyQt6.QtGui import QColor, QPainter, QPen
from PyQt6.QtWidgets import QFrame, QLabel, QSizePolicy, QWidget


class TextLink(QLabel):
    """
    Clickable text that behaves like an HTML link.
    """
    clicked = pyqtSignal()

    def __init__(self, text, parent=None, color="#ff2d55"):
        super().__init__(text, parent)
        self.setObjectName("TextLink")
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setStyleSheet(f"QLabel#TextLink {{ color: {color}; }}")

    def set_underlined(self, underlined):
        font = self.font()
        font.setUnderline(bool(underlined))
        self.setFont(font)

    def is_underlined(self):
        return self.font().underline()

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton and self.rect().contains(event.position().toPoint()):
            self.clicked.emit()
        super().mouseReleaseEvent(event)


class TappableFrame(QFrame):
    """
    A frame whose whole area, children included, is a single tap target.
    Children do not consume left clicks, so presses propagate up to here.
    """
    clicked = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton and self.rect().contains(event.position().toPoint()):
            self.clicked.emit()
        super().mouseReleaseEvent(event)


class CircleWidget(QWidget):
    """A filled circle of a fixed diameter."""

    def __init__(self, color, diameter, parent=None):
        super().__init__(parent)
        self._color = QColor(color)
        self.setFixedSize(diameter, diameter)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(self._color)
        painter.drawEllipse(QRectF(self.rect()))
        painter.end()


class ZoneFrame(QFrame):
    """
    A tinted area with a thin dotted outline, used to show which part of
    the symbol button reacts to taps. Only emits ``clicked`` when tappable.
    """
    clicked = pyqtSignal()

    def __init__(self, color, tappable, parent=None):
        super().__init__(parent)
        self.tappable = tappable
        tint = QColor(color)
        tint.setAlphaF(0.2)
        self._tint = tint
        if tappable:
            self.setCursor(Qt.CursorShape.PointingHandCursor)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), self._tint)
        pen = QPen(QColor("#808080"))
        pen.setWidthF(0.3)
        pen.setStyle(Qt.PenStyle.DotLine)
        painter.setPen(pen)
        painter.drawRect(self.rect().adjusted(0, 0, -1, -1))
        painter.end()
        super().paintEvent(event)

    def mousePressEvent(self, event):
        if self.tappable and event.button() == Qt.MouseButton.LeftButton:
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event):
        if self.tappable and event.button() == Qt.MouseButton.LeftButton:
            if self.rect().contains(event.position().toPoint()):
                self.clicked.emit()
            return
        super().mouseReleaseEvent(event)
