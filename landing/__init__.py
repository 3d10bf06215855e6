"""Landing page content pipeline: validate, normalize and fingerprint page JSON."""

__version__ = "1.0.0"
