"""启动控制台菜单脚本"""

import sys
import logging
from pathlib import Path

# 添加项目根目录到Python路径
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# 配置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def check_environment():
    """检查运行环境"""
    logger.info("检查运行环境...")

    if sys.version_info < (3, 10):
        logger.error(f"Python版本过低: {sys.version_info}，需要Python 3.10+")
        return False

    try:
        import pydantic
        import pydantic_settings
        import pytz
        logger.info("✅ 所有必要包已安装")
        return True
    except ImportError as e:
        logger.error(f"❌ 缺少必要包: {e}")
        logger.error("请运行: uv sync")
        return False


def main():
    """主函数"""
    try:
        if not check_environment():
            sys.exit(1)

        from train_management.menu import TrainMenu
        from train_management.services.train_manager import get_train_manager

        logger.info("🚀 启动列车管理菜单...")
        TrainMenu(get_train_manager()).run()

    except ImportError as e:
        logger.error(f"❌ 导入错误: {e}")
        logger.error("请确保已正确安装依赖: uv sync")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("已退出")
    except Exception as e:
        logger.error(f"❌ 启动失败: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
