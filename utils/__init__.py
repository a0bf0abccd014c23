# Shared helpers for the IvoireStore backend
