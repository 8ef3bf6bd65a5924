"""Interfaces/abstractions of the Core.

Contracts (Protocol) implemented by concrete adapters, so the Core depends
on abstractions and tests can plug in in-memory sources.
"""
