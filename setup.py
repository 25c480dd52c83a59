#!/usr/bin/env python
# -*- encoding: utf-8 -*-

"""Setup Module for the registry HTTP adaptation layer"""

import io
import re

from os.path import dirname, join

from setuptools import find_packages, setup


def read(*names, **kwargs):
    """Helper method to read files"""
    return io.open(
        join(dirname(__file__), *names),
        encoding=kwargs.get("encoding", "utf8"),
    ).read()


marshmallow_requires = ["marshmallow>=3.15.0"]

install_requires = marshmallow_requires + [
    "typer>=0.9.0",
    "typing-extensions>=4.4.0",
    "werkzeug>=2.2.0",
]

testing_requires = [
    "mock==5.1.0",
    "pytest-cov>=4.1.0",
    "pytest-mock>=3.12.0",
    "pytest>=7.4.3",
]

dev_requires = testing_requires + [
    "black>=23.11.0",
    "check-manifest>=0.49",
    "coverage>=7.3.2",
    "isort>=5.12.0",
    "pre-commit>=2.16.0",
    "tox>=4.11.3",
    "types-mock>=0.1.3",
]

setup(
    name="registry-http",
    version="0.1.0",
    license="BSD 3-Clause License",
    description="Request/response adaptation layer for the crate registry",
    long_description="%s\n%s"
    % (
        re.compile("^.. start-badges.*^.. end-badges", re.M | re.S).sub(
            "", read("README.rst")
        ),
        re.sub(":[a-z]+:`~?(.*?)`", r"``\1``", read("CHANGELOG.rst")),
    ),
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    zip_safe=False,
    python_requires=">=3.9",
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: Internet :: WWW/HTTP :: WSGI",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords=["wsgi", "werkzeug", "routing", "registry"],
    install_requires=install_requires,
    extras_require={
        "test": testing_requires,
        "tests": testing_requires,
        "testing": testing_requires,
        "dev": dev_requires,
        "all": dev_requires,
    },
    entry_points={"console_scripts": ["registry-admin = registry_http.cli:app"]},
)
