"""Gallery Server - browse a directory tree of images over HTTP."""
