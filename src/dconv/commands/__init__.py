"""Click plumbing shared by the dconv command line.

The root command itself lives in :mod:`dconv.cli`.
"""
