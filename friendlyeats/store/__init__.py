"""
Document store clients.

- Firestore: google-cloud-firestore client factory
- Memory: in-process store with the same batch API
"""
