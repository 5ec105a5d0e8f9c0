"""This module turns raw filesystem notifications into change events.

Raw notifications are noisy: one editor save can produce a creation, a few
modifications and a close, and attribute changes look like writes on some
platforms. The watcher keeps only notifications that mean "file content
changed", drops paths whose extension is not configured, collapses bursts
for the same file and publishes what is left as a single ``FilesChanged``
event onto a channel owned by the consumer.

Two implementations of the ``Watcher`` interface are provided. One uses
the watchdog observer, which runs the notification callback on its own
thread. The other does nothing and is used when watching is disabled.
``create_watcher`` picks one from the configuration.
"""
