"""Consistency checks between a Chef server and a local chef-repo checkout."""
