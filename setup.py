# setup.py
from setuptools import setup, find_packages

setup(
    name="eta",
    version="0.1.0",
    description="A small tree-walking Lisp evaluator with tail-call elimination",
    packages=find_packages(include=["eta", "eta.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
