"""Request signing, resource injection and authentication clients."""