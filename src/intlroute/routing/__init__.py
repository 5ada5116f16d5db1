"""Routing: template matching, specificity ordering and canonical resolution.

Templates are compiled once per template string and matched against
prefix-stripped pathnames.
"""
