"""Markdown building blocks: byte buffers, autolink detection and option parsing."""