"""
Prefect flows for the two pipelines.

Flows:
- catalog: filter occurrences.csv down to a list of catalog numbers
- images:  join occurrences + multimedia, filter, download images

Usage (local):
    python -m specimen_media.flows.catalog
    python -m specimen_media.flows.images

Usage (CLI):
    specimen-media filter [OCCURRENCES] [CATALOG_FILE] [OUTPUT]
    specimen-media images [CATALOG_FILE] [EXTRACTED_DIR] [OUTPUT_DIR]
"""
