"""批量求值 - 对一列表达式求值，结果收集为 DataFrame"""
import pandas as pd
import logging
from collections import OrderedDict

from config.config import BATCH_CONFIG, EVALUATOR_CONFIG
from core import CalculatorError, evaluate

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ['expression', 'value', 'error']


def load_expressions(file_path, column=None):
    """
    从CSV加载表达式列

    Parameters:
    - file_path: CSV 文件路径
    - column: 表达式列名，默认 BATCH_CONFIG["expression_column"]

    Returns:
    - 表达式 Series（保留原索引）
    """
    column = column or BATCH_CONFIG["expression_column"]
    logger.info(f"Loading expressions from {file_path}")

    # 空单元格保留为空串，而不是 NaN
    dataset = pd.read_csv(file_path, keep_default_na=False)
    if column not in dataset.columns:
        raise ValueError(f"Expression column '{column}' not found in dataset.")

    expressions = dataset[column].astype(str)
    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


class BatchEvaluator:

    def __init__(self, cache_size=None, grouping=None):
        self.cache_size = BATCH_CONFIG["cache_size"] if cache_size is None else cache_size
        self.grouping = EVALUATOR_CONFIG["grouping"] if grouping is None else grouping
        # 有限大小的 LRU 缓存：expression -> (value, error)
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        while len(self._result_cache) > self.cache_size:
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        self._result_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    @property
    def cache_stats(self):
        return {'hits': self._cache_hits, 'misses': self._cache_misses,
                'size': len(self._result_cache)}

    def evaluate_one(self, expression):
        """
        Returns:
            (value, error)：成功时 error 为 None，失败时 value 为 None、error 为错误种类名
        """
        if expression in self._result_cache:
            self._result_cache.move_to_end(expression)
            self._cache_hits += 1
            return self._result_cache[expression]

        self._cache_misses += 1
        try:
            outcome = (evaluate(expression, grouping=self.grouping), None)
        except CalculatorError as e:
            logger.warning(f"Error evaluating expression '{expression[:50]}': {e.kind}: {e}")
            outcome = (None, e.kind)

        if self.cache_size > 0:
            self._result_cache[expression] = outcome
            self._manage_cache()
        return outcome

    def evaluate_series(self, expressions):
        """
        Args:
            expressions: 表达式 Series 或列表
        Returns:
            DataFrame，列为 expression / value (Int64) / error，索引与输入一致
        """
        if not isinstance(expressions, pd.Series):
            expressions = pd.Series(list(expressions), dtype=object)

        outcomes = [self.evaluate_one(expr) for expr in expressions]
        result = pd.DataFrame({
            'expression': expressions.values,
            'value': pd.array([value for value, _ in outcomes], dtype='Int64'),
            # object dtype 保留 None，不随 pandas 版本推断为 str
            'error': pd.Series([error for _, error in outcomes],
                               index=expressions.index, dtype=object),
        }, index=expressions.index, columns=RESULT_COLUMNS)

        failed = int(result['error'].notna().sum())
        logger.info(f"Evaluated {len(result)} expressions, {failed} failed")
        return result

    def evaluate_csv(self, file_path, column=None):
        return self.evaluate_series(load_expressions(file_path, column))
