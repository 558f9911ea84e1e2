#!python

import os.path
import sys

from setuptools import find_packages, setup

sys.path.insert(0, os.path.abspath("src"))
from lea import versionstring

if __name__ == "__main__":
    setup(
        name="Lea-Automata",
        version=versionstring(),
        package_dir={"": "src"},
        packages=find_packages("src"),
        description="Finite automata with epsilon transitions and subset construction.",
        long_description=open("README.md").read(),
        long_description_content_type="text/markdown",
        license="Two-clause BSD license",
        keywords="automaton nfa dfa determinization",
        zip_safe=True,
        python_requires=">=3.8",
        install_requires=[
            "cached-property>=1.5.2",
            "loguru>=0.7.2",
        ],
        extras_require={
            "test": [
                "pytest>=8.3.2",
            ],
        },
        classifiers=[
            "Programming Language :: Python :: 3",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: BSD License",
            "Natural Language :: English",
            "Operating System :: OS Independent",
            "Programming Language :: Python :: 3.8",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "Topic :: Software Development :: Libraries :: Python Modules",
            "Topic :: Scientific/Engineering :: Mathematics",
        ],
    )
