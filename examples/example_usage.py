"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the roster logic lives in the services.
"""

import importlib

from config import get_settings_module

from src.student_roster.student_roster.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_file=settings.DATA_FILE)
    print(container.report_service.overall_stats())


if __name__ == "__main__":
    main()
