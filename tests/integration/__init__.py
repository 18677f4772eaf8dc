"""Integration tests for the conversation pipeline working as a system.

Requests go through the real pipeline, httpx client, schema parsing,
error classification and text cleanup. Only the remote API is replaced,
using httpx.MockTransport.
"""
