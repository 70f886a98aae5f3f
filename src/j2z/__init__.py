"""jekyll-to-zola: convert Jekyll YAML front matter into Zola TOML front matter."""

__version__ = "0.3.1"
