from prometheus_client import Counter

ipfs_uploads_total = Counter(
    "ipfs_uploads_total",
    "Total number of IPFS upload attempts",
    labelnames=["result"],
)

ipfs_upload_bytes_total = Counter(
    "ipfs_upload_bytes_total",
    "Total bytes successfully uploaded to IPFS",
)

ipfs_gateway_fetch_total = Counter(
    "ipfs_gateway_fetch_total",
    "Total number of gateway fetches",
    labelnames=["result"],
)
