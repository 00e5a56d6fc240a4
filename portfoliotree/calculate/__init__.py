"""Finance equations for returns, risk, portfolio statistics and asset weights."""