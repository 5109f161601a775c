"""Blynk IoT client building blocks: parameter buffers, FIFO, NTP, logging, LED indication and provisioning."""

__version__ = "1.0.0"