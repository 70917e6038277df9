"""
Builders that write an assembled Blog to the output directory.

Usage:
    from blogsite.builders import SiteBuilder

    stats = SiteBuilder(blog, Path("site")).build()
"""
from blogsite.builders.sitebuilder import SiteBuilder, SiteBuildStats

__all__ = ["SiteBuilder", "SiteBuildStats"]
