"""Bank notification lifecycle package.

Ensures the local ``bank_notifications`` package is treated as a regular
package; the layers below it (``domain``, ``application``, ``infrastructure``
and ``interfaces``) are plain directories resolved as namespace packages.
"""
