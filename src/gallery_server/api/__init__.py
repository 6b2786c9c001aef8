# Gallery HTTP API layer.
# Created: 2026-10-18
#
# listing.py serves the JSON directory/image listings under /api/,
# static.py serves the default document and every other path from the gallery root.
