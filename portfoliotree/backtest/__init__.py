"""Back-test support: weight snapshots, rebalancing intervals and look-back windows."""