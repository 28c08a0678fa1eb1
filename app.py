import logging
import os
import sys

from PySide6.QtCore import QSize, Qt
from PySide6.QtGui import QColor, QIcon, QPalette
from PySide6.QtWidgets import (
    QApplication,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListView,
    QListWidget,
    QListWidgetItem,
    QMenu,
    QMessageBox,
    QPushButton,
    QStyle,
    QVBoxLayout,
    QWidget,
)

from deskentry import DesktopEntryError, fields
from deskentry.discovery import list_desktop_apps
from deskentry.launch import launch

APP_NAME = "Desktop Board"
ICON_SIZE = 48

logger = logging.getLogger(__name__)


def load_icon(name, style):
    icon = QIcon()
    if name and os.path.isabs(name):
        icon = QIcon(name)
    elif name:
        icon = QIcon.fromTheme(name)
    if icon.isNull():
        icon = style.standardIcon(QStyle.SP_DesktopIcon)
    return icon


def matches_filter(app, text):
    if not text:
        return True
    haystack = [app.get("name", ""), app.get("comment", ""), *app.get("keywords", [])]
    return any(text in value.lower() for value in haystack)


class AppBoard(QWidget):
    def __init__(self):
        super().__init__()
        self.setWindowTitle(APP_NAME)
        self.setMinimumSize(900, 600)
        self.apps = []

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(24, 24, 24, 24)
        main_layout.setSpacing(16)

        header = QHBoxLayout()
        title = QLabel(APP_NAME)
        title.setObjectName("title")
        header.addWidget(title)
        header.addStretch()
        self.filter_input = QLineEdit()
        self.filter_input.setPlaceholderText("Search apps")
        self.filter_input.setMinimumWidth(260)
        self.filter_input.textChanged.connect(self.refresh_list)
        header.addWidget(self.filter_input)
        reload_button = QPushButton("Reload")
        reload_button.setObjectName("secondaryButton")
        reload_button.clicked.connect(self.reload_apps)
        header.addWidget(reload_button)
        main_layout.addLayout(header)

        self.list_widget = QListWidget()
        self.list_widget.setViewMode(QListView.IconMode)
        self.list_widget.setResizeMode(QListView.Adjust)
        self.list_widget.setMovement(QListView.Static)
        self.list_widget.setIconSize(QSize(ICON_SIZE, ICON_SIZE))
        self.list_widget.setGridSize(QSize(140, 110))
        self.list_widget.setWordWrap(True)
        self.list_widget.setContextMenuPolicy(Qt.CustomContextMenu)
        self.list_widget.customContextMenuRequested.connect(self._show_menu)
        self.list_widget.itemActivated.connect(lambda item: self.launch_app(item.data(Qt.UserRole)))
        main_layout.addWidget(self.list_widget, 1)

        self.empty_label = QLabel("No applications found.")
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setObjectName("empty")
        main_layout.addWidget(self.empty_label)

        self.reload_apps()

    def reload_apps(self):
        self.apps = list_desktop_apps()
        self.refresh_list()

    def refresh_list(self, *_):
        filter_text = self.filter_input.text().lower().strip()
        self.list_widget.clear()
        for app in self.apps:
            if not matches_filter(app, filter_text):
                continue
            item = QListWidgetItem(load_icon(app["icon"], self.style()), app["name"])
            if app["comment"]:
                item.setToolTip(app["comment"])
            item.setData(Qt.UserRole, app)
            self.list_widget.addItem(item)

        has_apps = self.list_widget.count() > 0
        self.empty_label.setVisible(not has_apps)
        self.list_widget.setVisible(has_apps)

    def _show_menu(self, position):
        item = self.list_widget.itemAt(position)
        if not item:
            return
        app = item.data(Qt.UserRole)
        entry = app["entry"]

        menu = QMenu(self)
        menu.addAction("Open", lambda: self.launch_app(app))
        menu.addAction("Open With Files...", lambda: self.launch_with_files(app))
        if app["actions"]:
            menu.addSeparator()
        for action in app["actions"]:
            group = entry.action_group(action)
            label = group.get(fields.NAME) or action
            menu.addAction(label, lambda action=action: self.launch_app(app, action=action))
        menu.exec(self.list_widget.viewport().mapToGlobal(position))

    def launch_with_files(self, app):
        paths, _ = QFileDialog.getOpenFileNames(self, f"Open with {app['name']}")
        if paths:
            self.launch_app(app, args=paths)

    def launch_app(self, app, args=(), action=None):
        try:
            launch(app["entry"], args, action=action, source_path=app["path"])
        except DesktopEntryError as exc:
            logger.warning("Launching %s failed: %s", app["path"], exc)
            QMessageBox.critical(self, "Launch failed", str(exc))


def apply_theme(app):
    app.setStyle("Fusion")
    palette = app.palette()
    palette.setColor(QPalette.Window, QColor("#f5f2ec"))
    palette.setColor(QPalette.WindowText, QColor("#1f1f1f"))
    palette.setColor(QPalette.Base, QColor("#ffffff"))
    palette.setColor(QPalette.Highlight, QColor("#b55a30"))
    palette.setColor(QPalette.HighlightedText, QColor("#ffffff"))
    app.setPalette(palette)

    app.setStyleSheet(
        """
        QWidget {
            font-family: "Cantarell", "Noto Sans", sans-serif;
            font-size: 13px;
        }
        QLabel#title {
            font-size: 26px;
            font-weight: 600;
        }
        QLabel#empty {
            color: #5c5a56;
            font-size: 14px;
        }
        QListWidget {
            border: 1px solid #e0d6c9;
            border-radius: 12px;
            padding: 8px;
        }
        QPushButton#secondaryButton {
            background: #ffffff;
            border: 1px solid #d2c9bc;
            border-radius: 10px;
            padding: 6px 14px;
        }
        QPushButton#secondaryButton:hover {
            background: #f0e8dd;
        }
        """
    )


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv)
    apply_theme(app)
    window = AppBoard()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
