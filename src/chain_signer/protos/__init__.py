"""
Generated protobuf modules for messages outside the cosmos-sdk and ibc-go
sets shipped with cosmpy.
"""
