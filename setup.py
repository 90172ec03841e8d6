#!/usr/bin/env python

"""
    flatcss
    =======

    flatcss converts stylesheets to shorthand-free native styles.

"""

from setuptools import setup

setup()
