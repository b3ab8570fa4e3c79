"""Bundled data files for rmd."""
