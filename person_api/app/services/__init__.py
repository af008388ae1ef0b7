"""
Service layer abstraction.

Services validate request payloads and delegate to the store.  The
store used here keeps everything in memory; swapping it for real
database queries would not require changes to the API handlers.
"""
