"""Note collection primitives: file names, front matter, creation, scanning."""
