# Where: ytdtd.features.album.__init__
# What: Expose the album packaging feature's domain types and use cases.
# Why: Provide a cohesive import surface for the application and UI layers.
