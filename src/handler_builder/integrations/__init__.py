"""Bindings between built handlers and hosting frameworks."""
