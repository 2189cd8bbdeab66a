from scriptdetect.runtime.sharding import ShardingConfig, ShardWindow, build_shards

__all__ = ["ShardingConfig", "ShardWindow", "build_shards"]
