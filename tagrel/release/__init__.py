"""Tag-to-releases pipeline.

- ref: reference name resolution and validation
- assets: attachment collection
- git: commit resolution
- gh: release hosting adapter
- publisher: the three-tier delete/create loop
- service: stage sequencing
"""

from __future__ import annotations
