"""
Analysis programs. Each module exposes JOB, summarize(), build_report() and main().
"""

from . import (
    low_selling_products,
    monthly_sales_trends,
    most_popular_product_type,
    retail_vs_warehouse_split,
    top_selling_products,
    total_sales_by_supplier,
)

ANALYSES = {
    "top-selling-products": top_selling_products,
    "monthly-sales-trends": monthly_sales_trends,
    "most-popular-product-type": most_popular_product_type,
    "total-sales-by-supplier": total_sales_by_supplier,
    "low-selling-products": low_selling_products,
    "retail-vs-warehouse-split": retail_vs_warehouse_split,
}

__all__ = ["ANALYSES"]
