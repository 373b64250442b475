"""Entry point for the WGS84 / RT90 / SWEREF99 converter.

Run with:
    swegeodesy
or
    python -m swegeodesy.main

Set SWEGEODESY_LOG_LEVEL (e.g. DEBUG) to see conversion logging.
"""

import logging
import os
import sys

from PyQt5.QtWidgets import QApplication

from .ui import ConverterUI


def main():
    logging.basicConfig(
        level=os.environ.get("SWEGEODESY_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    app.setStyle("Fusion")
    window = ConverterUI()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
