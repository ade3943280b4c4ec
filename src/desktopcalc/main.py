"""
Application Initialization
==========================
This module wires the calculator together and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging.
2. Instantiates the ExpressionEngine (Model).
3. Instantiates the CalculatorWindow (View) and hands it the engine.
"""
import sys

from desktopcalc.app.application import create_app
from desktopcalc.logging_config import route_qt_messages, setup_logging
from desktopcalc.model.engine import ExpressionEngine
from desktopcalc.view.main_window import CalculatorWindow


def main() -> int:
    # 1. Setup Logging (DESKTOPCALC_LOG_LEVEL=DEBUG traces every key, DESKTOPCALC_LOG_FILE keeps a copy)
    setup_logging()
    route_qt_messages()

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the engine
    engine = ExpressionEngine()

    # 4. Initialize the Main Window, passing the engine
    window = CalculatorWindow(engine)
    window.show()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
