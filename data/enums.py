from enum import Enum

SERVICE_VERSION = "2018-03-28"
DEFAULT_SERVICE_HOST = "blob.core.windows.net"

# Request headers
HEADER_DATE = "x-ms-date"
HEADER_VERSION = "x-ms-version"
HEADER_CLIENT_REQUEST_ID = "x-ms-client-request-id"
HEADER_LEASE_ID = "x-ms-lease-id"
HEADER_AUTHORIZATION = "Authorization"

# Response headers
HEADER_BLOB_PUBLIC_ACCESS = "x-ms-blob-public-access"
HEADER_REQUEST_ID = "x-ms-request-id"
HEADER_ETAG = "ETag"
HEADER_LAST_MODIFIED = "Last-Modified"
HEADER_RESPONSE_DATE = "Date"


class PublicAccess(str, Enum):
    NONE = "none"
    CONTAINER = "container"
    BLOB = "blob"
