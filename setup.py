# setup.py
from setuptools import setup, find_packages

setup(
    name="hyoka",
    version="0.1.0",
    description="A minimal symbolic-expression interpreter",
    packages=find_packages(include=["hyoka", "hyoka.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["hyoka=hyoka.__main__:main"],
    },
    zip_safe=False,
)
