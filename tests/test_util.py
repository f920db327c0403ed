import os

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def open_file(filename: str) -> str:
    with open(os.path.join(ROOT, filename), "r", encoding="utf8") as f:
        return f.read()
