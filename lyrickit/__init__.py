"""Tools for making scrolling lyrics: text, URL encoding, encoded files, file splitting, HTTP and downloads."""

__version__ = "2.2.5"

__all__ = ["defines", "strings", "urlencoding", "files", "splitfile", "http", "downloader"]