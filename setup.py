# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"The qfold setup file."

import os

from setuptools import setup, find_packages

README_PATH = os.path.join(os.path.abspath(os.path.dirname(__file__)), "README.md")
with open(README_PATH) as readme_file:
    README = readme_file.read()

requirements = [
    "numpy>=1.17",
    "ply>=3.10",
    "sympy>=1.3",
]

setup(
    name="qfold",
    version="0.1.0",
    description="Rotation folding optimizer for OpenQASM 2.0 circuits",
    long_description=README,
    long_description_content_type="text/markdown",
    license="Apache 2.0",
    classifiers=[
        "Environment :: Console",
        "License :: OSI Approved :: Apache Software License",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: MacOS",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering",
    ],
    keywords="qasm quantum circuit optimization t-count",
    packages=find_packages(exclude=["test*"]),
    install_requires=requirements,
    extras_require={
        "test": ["ddt>=1.2.0"],
    },
    package_data={"qfold.qasm": ["libs/*.inc"]},
    include_package_data=True,
    python_requires=">=3.8",
)
