"""Generator for the ZAP Python API client modules."""
