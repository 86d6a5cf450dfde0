"""
Infrastructure Storage Layer.

Supabase Storage implementation of the BlobStore port.

Usage:
    from supabase import acreate_client
    from infrastructure.storage import SupabaseBlobStore

    client = await acreate_client(SUPABASE_URL, SUPABASE_KEY)
    blob_store = SupabaseBlobStore(client, bucket="workout-images")
"""

from infrastructure.storage.blob_store import SupabaseBlobStore, decode_data_url

__all__ = [
    "SupabaseBlobStore",
    "decode_data_url",
]
