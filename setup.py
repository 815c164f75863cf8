# setup.py
from setuptools import setup, find_packages

setup(
    name="currylisp",
    version="0.3.0",
    description="A small Lisp interpreter with automatic currying and macros",
    packages=find_packages(include=["currylisp", "currylisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "currylisp=currylisp.__main__:main",
        ],
    },
    zip_safe=False,
)
