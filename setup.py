# setup.py
from setuptools import setup, find_packages

setup(
    name="mallow",
    version="0.1.0",
    description="A tree-walking evaluator for a small Lisp",
    packages=find_packages(include=["mallow", "mallow.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["mallow=mallow.repl:main"],
    },
    zip_safe=False,
)
