"""
Application Initialization
==========================
This module constructs the desktop application and starts the Qt event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging.
2. Instantiates the global state store (controls, configuration, design).
3. Instantiates the Main Window (View) and passes the store into it.
4. Prevents circular import errors by being the orchestrator.
"""
from __future__ import annotations

import logging
from typing import Optional

from lathframe.config import LayoutConfig
from lathframe.logging_config import setup_logging
from lathframe.model.controls import ControlPrimitives


def main(
    controls: Optional[ControlPrimitives] = None,
    config: Optional[LayoutConfig] = None,
    log_level: int = logging.INFO,
    log_file: Optional[str] = None,
) -> int:
    # 1. Setup Logging
    setup_logging(level=log_level, log_file=log_file)

    # Deferred Qt imports
    from lathframe.app.application import create_app
    from lathframe.app.state import Store
    from lathframe.app.ui.main_window import MainWindow

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the state store
    store = Store(controls=controls, config=config)

    # 4. Initialize the Main Window, passing the store
    window = MainWindow(store)
    window.show()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
