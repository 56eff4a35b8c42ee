#!/usr/bin/env python
from setuptools import setup

setup(name='rationalise',
      version='1.0',
      description='Replace identical copies of files with hard links to a single file',
      author='The rationalise authors',
      py_modules=["rationalise"],
      python_requires=">=3.5",
      test_suite="tests",
      entry_points={
          'console_scripts': ['rat=rationalise:main']
      },
      classifiers=(
          "License :: OSI Approved :: GNU General Public License v2 or later (GPLv2+)",
          "Programming Language :: Python :: 3",
          "Operating System :: POSIX",
          "Operating System :: MacOS",
          "Operating System :: MacOS :: MacOS X",
          "Operating System :: Unix",
      ),
)
