"""配置文件"""

# 求值器参数
EVALUATOR_CONFIG = {
    "grouping": True,  # 支持括号；False 时括号进入规约即报 UnsupportedConstruct
    "operand_dtype": "int32",  # 操作数取值范围（numpy dtype 名）
}

# token 读取参数
READER_CONFIG = {
    "delimiter": " ",  # 单个 ASCII 空格
    "chunk_size": 4096,  # 流式读取的块大小
    "encoding": "utf-8",
}

# 批量求值参数
BATCH_CONFIG = {
    "cache_size": 1000,
    "expression_column": "expression",
}

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    import numpy as np

    assert np.issubdtype(np.dtype(EVALUATOR_CONFIG["operand_dtype"]), np.signedinteger), \
        "操作数必须是有符号整数"
    assert len(READER_CONFIG["delimiter"]) == 1, "分隔符必须是单个字符"
    assert READER_CONFIG["chunk_size"] > 0, "chunk_size 必须为正"
    assert BATCH_CONFIG["cache_size"] >= 0, "cache_size 不能为负"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    print("Configuration validated successfully!")
