#!/usr/bin/env python3

import sys

from setuptools import setup

if sys.version_info < (3, 8):
    sys.exit("Python 3.8+ is required; you are using %s" % sys.version)

setup(
    name="wordle-sim",
    version="0.1",
    description=("Simulate Wordle games between a scoring oracle and pluggable guessers"),
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='GPL v3 or later',
    install_requires=open('requirements.txt').readlines(),
    extras_require={'test': open('requirements-test.txt').readlines()},
    packages=["wordle"],
    entry_points={'console_scripts': ['wordle-sim=wordle.__main__:main']},
    classifiers=[
        'Environment :: Console',
        'Topic :: Games/Entertainment :: Puzzle Games',
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
    ],
)
