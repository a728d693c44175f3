"""Setup for Egg Timer.

Install for development:
    pip install -e ".[test]"

Build a macOS .app bundle:
    pip install py2app
    python setup.py py2app
"""

import sys

from setuptools import setup, find_packages

APP = ["main.py"]
DATA_FILES = []
OPTIONS = {
    "argv_emulation": False,
    "iconfile": None,  # icon is drawn at runtime
    "plist": {
        "CFBundleName": "Egg Timer",
        "CFBundleDisplayName": "Egg Timer",
        "CFBundleIdentifier": "com.eggtimer.app",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "NSHighResolutionCapable": True,
        "LSMinimumSystemVersion": "13.0",
    },
}

py2app_args = {}
if "py2app" in sys.argv:
    py2app_args = {
        "app": APP,
        "data_files": DATA_FILES,
        "options": {"py2app": OPTIONS},
        "setup_requires": ["py2app"],
    }

setup(
    name="EggTimer",
    version="0.1.0",
    packages=find_packages(include=["eggtimer", "eggtimer.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyQt6>=6.5",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "gui_scripts": ["eggtimer = eggtimer.__main__:main"],
    },
    **py2app_args,
)
