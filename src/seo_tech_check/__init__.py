"""Static SEO audit for legacy projects using schema.org, meta tags, favicons, and more."""

__version__ = "0.1.0"
