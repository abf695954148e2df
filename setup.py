# setup.py
from setuptools import setup, find_packages

setup(
    name="pebble",
    version="0.1.0",
    description="A small lexically-scoped Lisp interpreter",
    packages=find_packages(include=["pebble", "pebble.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["pebble=pebble.repl:main"],
    },
    zip_safe=False,
)
