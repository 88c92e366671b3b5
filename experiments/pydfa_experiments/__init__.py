"""Experiment utilities for pydfa library.

This package contains harness code for storing execution traces and
pickling built automata. These are not part of the core pydfa library
package.
"""
