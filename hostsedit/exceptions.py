#!/usr/bin/env python3


class HostsEditError(Exception):
    """Base class for hostsedit errors"""


class ElevationError(HostsEditError):
    """Raised when the process could not be re-launched with elevated rights"""
