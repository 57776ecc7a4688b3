"""Parsing and compact formatting of integers, decimals, floats and grouped numbers."""