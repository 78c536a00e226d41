"""
服务包
"""
