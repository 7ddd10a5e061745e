"""Flight-log parser front ends.

Each front end turns one kind of log export into a flight-path geometry:
- parse_tabular: Delimited-text (CSV-like) logs with an unknown layout
- parse_kml: KML flight logs, plain or zipped as KMZ
- geometry: Shared assembly of the final ``LineString``
- dispatch: Front-end selection by file name
"""
