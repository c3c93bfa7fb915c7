# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: manual.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: Access to the manual bundled with the package.
# -----------------------------------------------------------------------------
from importlib import resources

MANUAL_FILE = "manual.md"
USAGE_SECTIONS = ("Synopsis", "Options")


def load_manual() -> str:
    """Return the full manual as Markdown text."""
    source = resources.files("wpm_tester").joinpath("data").joinpath(MANUAL_FILE)
    return source.read_text(encoding="utf-8")


def usage_summary(manual: str) -> str:
    """
    Cut the usage summary out of the manual: the title line followed by the
    Synopsis and Options sections.
    """
    lines = manual.splitlines()
    summary = lines[:1] + [""]
    keep = False
    for line in lines[1:]:
        if line.startswith("## "):
            keep = line[3:].strip() in USAGE_SECTIONS
        if keep:
            summary.append(line)
    return "\n".join(summary).strip() + "\n"
