key_size = 40
entry_size = key_size + 8 + 8  # key + offset + length

# Little-endian, no padding between fields
offset_format = "<Q"
entry_format = f"<{key_size}sQQ"

max_uint64 = 2**64 - 1

temp_suffix = ".tmp"

# Advance the progress bar at most once per this many scanned bytes
progress_update_bytes = 1024 * 1024
