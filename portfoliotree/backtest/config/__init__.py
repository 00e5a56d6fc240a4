"""Rebalancing intervals and look-back windows for back-tests."""