from __future__ import annotations

import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import load_settings

from .container import Container, build_container
from .demo import seed_demo_data
from .employees.controller import register as register_employees
from .payroll.controller import register as register_payroll
from .shifts.controller import register as register_shifts

logger = logging.getLogger(__name__)


def create_app(*, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings = load_settings()
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.debug("settings=%s", settings.__name__)

    container = container or build_container()
    if bool(getattr(settings, "SEED_DEMO_DATA", False)):
        seed_demo_data(container)

    register_employees(app, container)
    register_shifts(app, container)
    register_payroll(app, container)

    return app
