"""Offshore Activity Classification System.

Turns heterogeneous offshore-logistics records into drilling-only views with:
- Manifest-based Drilling/Production classification of voyages
- Vessel + time-window linkage between voyages and other record kinds
- Drilling-only filtering of manifests, events, bulk actions and cost lines
- Signature-based duplicate detection for voyage events
"""

__version__ = "0.1.0"
