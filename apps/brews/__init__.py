"""
Brews App - Espresso Brew Log

This app records espresso brews from a single-page form and reads them back
into a filterable history table.

Key Features:
- Shift classification (AM / PM / Night) from the time of day
- Relative timestamps ("Today 09:14", "Yesterday 22:05", "03/01/2024 07:30")
- Today / week / all filtering over a cached record list
- Per-window statistics (averages, shift breakdown)

Architecture:
- Models: BrewRecord
- Services: shift classification, display formatting, record filter,
  statistics, RecordStore adapter
- Controller: BrewLogController (cache + active filter, injected store/clock)
- Views: server-rendered page and JSON API
"""

__version__ = '1.0.0'
