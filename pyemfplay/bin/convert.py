#!/usr/bin/env python3

#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

import argparse
import logging
import sys
from pathlib import Path

from pyemfplay.convert import FileConverter
from pyemfplay.convert.config import DEFAULTS
from pyemfplay.core import settings
from pyemfplay.exceptions import ConvertError
from pyemfplay.logging import LOGGER_NAMES, configure as configureLoggers


def getOutputFile(inputFile: Path, output: str) -> Path:
    """
    Get the path of the converted file. Without an explicit output, the SVG is written next to the input file.
    """
    if not output:
        return inputFile.with_suffix(".svg")

    outputFile = Path(output)

    if outputFile.is_dir():
        return outputFile / inputFile.with_suffix(".svg").name

    return outputFile


def main():
    """
    Parse the provided command line arguments and convert a metafile to SVG.
    :return: The exit code (0 for normal exit, non-zero for errors)
    """
    parser = argparse.ArgumentParser()
    parser.add_argument("input", help="Path to an .emf file")
    parser.add_argument("-o", "--output", help="Path of the SVG file to write, or folder to write it to")
    parser.add_argument("-L", "--log-level", help="Log level", default=None,
                        choices=["INFO", "DEBUG", "WARNING", "ERROR", "CRITICAL"], nargs="?")
    parser.add_argument("-F", "--log-filter",
                        help="Only show logs from this logger name (accepts '*' wildcards)", default=None)
    parser.add_argument("--json-log", help="Also write JSON logs to the log folder of the output folder",
                        action="store_true")
    parser.add_argument("--no-progress", help="Do not display the record progress bar", action="store_true")
    args = parser.parse_args()

    inputFile = Path(args.input)
    outputFile = getOutputFile(inputFile, args.output)

    cfg = settings.load(f'{settings.CONFIG_DIR}/convert.ini', DEFAULTS)

    # Modify configuration with switches.
    if args.log_level:
        cfg.set('vars', 'level', args.log_level)
    if args.log_filter:
        cfg.set('logs', 'filter', args.log_filter)
    if args.json_log:
        cfg.set('vars', 'output_dir', str(outputFile.parent.absolute()))
        cfg.set('logs:loggers:pyemfplay', 'handlers', 'console, json')

    configureLoggers(cfg)
    logger = logging.getLogger(LOGGER_NAMES.CONVERT)

    converter = FileConverter(inputFile, outputFile, showProgress=not args.no_progress)

    try:
        converter.process()
    except ConvertError as e:
        logger.debug("Conversion of %(input)s failed", {"input": inputFile}, exc_info=True)
        sys.stderr.write(f"Error: {e}\n")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
