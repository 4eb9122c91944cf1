"""Core runtime primitives shared by bannerctl commands."""
