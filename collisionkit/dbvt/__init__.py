"""Node types and node storage with refitting for a dynamic bounding volume tree."""