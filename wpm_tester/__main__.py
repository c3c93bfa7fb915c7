# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: __main__.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: Allows running the WPM tester with python -m wpm_tester.
# -----------------------------------------------------------------------------
from wpm_tester.cli import main

main()
