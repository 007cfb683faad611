"""
Main Application Window
=======================
The primary GUI container: the word input row, the distinct-word counter and
the sphere canvas.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the input widgets to the session and starts the
   animation loop that feeds the canvas.
"""
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLineEdit, QPushButton, QLabel
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent

from wordsphere.config import VISIBLE_APP_NAME, DEFAULT_WINDOW_SIZE
from wordsphere.controller.animation import AnimationLoop
from wordsphere.controller.session import WordCloudSession
from wordsphere.view.widgets.sphere_canvas import SphereCanvas


class MainWindow(QMainWindow):
    def __init__(self, session: WordCloudSession) -> None:
        super().__init__()
        self.session: WordCloudSession = session

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(*DEFAULT_WINDOW_SIZE)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)

        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # --- 1. INPUT ROW ---
        input_row = QHBoxLayout()
        input_row.setContentsMargins(12, 8, 12, 8)

        self.word_input = QLineEdit()
        self.word_input.setPlaceholderText("Type a word and press Enter")
        self.word_input.returnPressed.connect(self.on_add_clicked)
        input_row.addWidget(self.word_input)

        self.btn_add = QPushButton("Add")
        self.btn_add.clicked.connect(self.on_add_clicked)
        input_row.addWidget(self.btn_add)

        self.lbl_count = QLabel()
        self.lbl_count.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.lbl_count.setMinimumWidth(120)
        input_row.addWidget(self.lbl_count)

        main_layout.addLayout(input_row)

        # --- 2. SPHERE ---
        self.canvas = SphereCanvas(self.session)
        main_layout.addWidget(self.canvas, stretch=1)

        # --- SIGNAL CONNECTIONS ---
        self.session.stats_changed.connect(self.on_stats_changed)
        self.on_stats_changed(self.session.distinct_word_count())

        # --- ANIMATION ---
        self.animation = AnimationLoop(self.session, self.canvas, parent=self)
        self.animation.start()

    # --- SLOTS ---

    def on_add_clicked(self) -> None:
        self.session.add_word(self.word_input.text())
        self.word_input.clear()
        self.word_input.setFocus()

    def on_stats_changed(self, count: int) -> None:
        self.lbl_count.setText(f"Words: {count}")

    def closeEvent(self, event: QCloseEvent) -> None:
        self.animation.stop()
        super().closeEvent(event)
