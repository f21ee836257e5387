"""psbuild — static-asset build pipeline for the Showdown web client."""

__version__ = "0.1.0"
