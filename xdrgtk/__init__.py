"""Tuner front-end core: settings, RDS logging, RDS Spy link, scheduler, antenna pattern feed and spectral scan."""

__version__ = "1.2"