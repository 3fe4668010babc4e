#!/usr/bin/env python3
"""
Build Helper
Resolves the build target and output path from the arguments an editor
build process forwards to its build script.

Usage: buildhelper [-buildTarget <target>] [-output <dir|file>] [-name <file>]
                   [-productName <name>] [-format text|json]
"""

import json
import sys

from src.core.config import Config
from src.core.build_helper import BuildHelper, MissingArgumentValueError, host_arguments
from src.core.crash_handler import install_exception_handler
from src.core.logger import setup_logger

PRODUCT_NAME_ARG = "productName"
FORMAT_ARG = "format"


def main(argv=None):
    """Entry point for the build helper."""
    if argv is None:
        argv = sys.argv

    install_exception_handler()
    logger = setup_logger("BuildHelper")

    config = Config.load_config()
    helper = BuildHelper(
        host_arguments(argv),
        product_name=Config.get_product_name(config),
        active_build_target=Config.get_active_build_target(config),
    )

    try:
        product_name = helper.get_argument(PRODUCT_NAME_ARG)
        if product_name:
            helper.product_name = product_name
        output_format = helper.get_argument(FORMAT_ARG, "text")
        settings = helper.resolve()
    except MissingArgumentValueError as e:
        logger.error(str(e))
        return 2

    if output_format == "json":
        print(json.dumps(settings.to_dict(), indent=2))
    else:
        print(f"build_target={settings.build_target.name}")
        print(f"output_path={settings.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
