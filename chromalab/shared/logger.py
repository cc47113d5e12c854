#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/shared/logger.py

import argparse
import sys

from chromalab.core import config as c


def log(level: str, message: str) -> None:
    level = str(level).lower()
    stream = sys.stdout if level in ("info", "success") else sys.stderr
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


class ChromalabArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """Report argument errors through the colored logger and exit with status 2."""
        log("error", message)
        sys.exit(2)
