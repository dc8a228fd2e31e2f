"""Cash-flow forecasting and insight engine"""
