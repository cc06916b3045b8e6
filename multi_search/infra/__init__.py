"""Infra layer utilities (user-agent pools, browser headers)."""

from .ua_pool import BrowserHeaderFactory, HeaderFactory, UserAgentPool

__all__ = ["BrowserHeaderFactory", "HeaderFactory", "UserAgentPool"]
