"""Wire encoders for metric documents."""
