"""Packaging for JetCounter.

Install for development:
    pip install -e ".[test]"

Build a macOS .app bundle:
    pip install py2app
    python setup.py py2app
"""

import sys

from setuptools import setup

APP = ["main.py"]
OPTIONS = {
    "argv_emulation": False,
    "plist": {
        "CFBundleName": "JetCounter",
        "CFBundleDisplayName": "JetCounter",
        "CFBundleIdentifier": "com.jetcounter.app",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "NSHighResolutionCapable": True,
    },
}

app_kwargs = {}
if "py2app" in sys.argv:
    app_kwargs = dict(
        app=APP,
        options={"py2app": OPTIONS},
        setup_requires=["py2app"],
    )

setup(
    name="JetCounter",
    version="0.1.0",
    packages=["jetcounter", "jetcounter.timer", "jetcounter.ui"],
    python_requires=">=3.10",
    install_requires=["PyQt6"],
    extras_require={"test": ["pytest"]},
    entry_points={"gui_scripts": ["jetcounter = jetcounter.__main__:main"]},
    **app_kwargs,
)
